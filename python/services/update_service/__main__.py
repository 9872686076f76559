from product_common.http import serve

from update_service.app import app

serve("update", app)
