import logging
import signal
import sys
from queue import Queue
from typing import Any, Callable, Optional

from app_config import AppConfigurationError, load_app_config, resolve_config_path
from pomodoro import SessionClock
from runtime import QueueCommandPublisher, RuntimeBootstrap, RuntimeEngine, RuntimeHooks
from server import ServerConfigurationError, UIServer, UIServerConfig


def setup_logging(level: int = logging.INFO) -> logging.Logger:
    """Configure logging for the application."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    return logging.getLogger("runtime")


def setup_signal_handlers(request_stop: Callable[[], None]) -> None:
    """Set up graceful shutdown on SIGTERM and SIGINT."""
    logger = logging.getLogger("runtime")

    def signal_handler(signum: int, frame) -> None:
        del frame
        logger.info("%s received, stopping.", signal.Signals(signum).name)
        request_stop()

    signal.signal(signal.SIGTERM, signal_handler)
    signal.signal(signal.SIGINT, signal_handler)


def main() -> int:
    """Run the session clock with its tick source and web UI."""
    logger = setup_logging(level=logging.INFO)

    try:
        config_path = resolve_config_path()
        app_config = load_app_config(str(config_path))
        logger.info("Loaded runtime config: %s", config_path)
    except AppConfigurationError as error:
        logger.error("App configuration error: %s", error)
        return 1

    logging.getLogger().setLevel(app_config.logging.level)

    event_queue: Queue[Any] = Queue()
    clock = SessionClock(logger=logging.getLogger("pomodoro"))

    ui_server: Optional[UIServer] = None
    try:
        ui_config = UIServerConfig.from_settings(app_config.ui_server)
    except ServerConfigurationError as error:
        logger.error("UI server configuration error: %s", error)
        return 1

    if ui_config.enabled:
        ui_server = UIServer(
            config=ui_config,
            logger=logging.getLogger("ui_server"),
            command_handler=QueueCommandPublisher(event_queue).publish,
        )
        try:
            ui_server.start()
        except RuntimeError as error:
            logger.error("UI server failed to start: %s", error)
            return 1
    else:
        logger.info("UI server disabled via ui_server.enabled=false")

    engine = RuntimeEngine(
        RuntimeBootstrap(
            logger=logger,
            app_config=app_config,
            clock=clock,
            event_queue=event_queue,
            ui_server=ui_server,
            hooks=RuntimeHooks(setup_signal_handlers=setup_signal_handlers),
        )
    )
    return engine.run()


if __name__ == "__main__":
    sys.exit(main())
