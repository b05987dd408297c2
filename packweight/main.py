import logging

import uvicorn
from packweight.api.api_run import app
from packweight.utilities.config import APP_HOST, APP_PORT, DATA_DIR, LOG_LEVEL


if __name__ == "__main__":
    logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    logging.getLogger("packweight_app").info("Serving pack data from %s", DATA_DIR)
    uvicorn.run(app, host=APP_HOST, port=APP_PORT, log_level=LOG_LEVEL.lower())
