from product_common.http import serve

from delete_service.app import app

serve("delete", app)
