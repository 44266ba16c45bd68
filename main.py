from candyboard import create_app
from gevent.pywsgi import WSGIServer
import logging

app = create_app()

if __name__ == '__main__':
    host = app.config['HOST']
    port = app.config['PORT']
    logging.getLogger(__name__).info(f"Candy game backend listening on http://{host}:{port}")
    http_server = WSGIServer((host, port), app)
    http_server.serve_forever()
