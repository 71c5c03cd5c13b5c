import os
from lixtools.app.utils import setup_logger
from lixtools.app.main import create_app
from lixtools.pipeline.config import SERVER_HOST, SERVER_PORT

logger = setup_logger("lixtools")


def run_server():
    port = int(os.getenv("WORKER_PORT", str(SERVER_PORT)))

    logger.info(f"[SERVER] Initializing lixTools gateway on port {port}...")

    tools_app = create_app()
    tools_app.run(host=SERVER_HOST, port=port, workers=1)


if __name__ == "__main__":
    run_server()
