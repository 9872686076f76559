from product_common.http import serve

from create_service.app import app

serve("create", app)
