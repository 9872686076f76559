from product_common.http import serve

from read_service.app import app

serve("read", app)
