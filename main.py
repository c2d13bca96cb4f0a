import logging

from bridge.constants import APP_PORT, APP_VERSION, DEBUG_MODE

logging.basicConfig(
    level=logging.DEBUG if DEBUG_MODE else logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

from bridge.controller import create_app  # noqa: E402

logging.getLogger(__name__).info("VERSION: %s", APP_VERSION)
app = create_app()

if __name__ == '__main__':
    app.run(host='0.0.0.0', port=APP_PORT, debug=DEBUG_MODE)
