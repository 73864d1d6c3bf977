import logging

from solovay_strassen import config
from solovay_strassen.web import create_app

logging.basicConfig(level=config.LOG_LEVEL, format="%(asctime)s %(name)s %(levelname)s %(message)s")

app = create_app()

if __name__ == "__main__":
    app.run("127.0.0.1", 8082, debug=True)
