from pysdui.app import App
from pysdui.core import AppConfig, get_app_logger, init_logging, init_telemetry


def main() -> None:
	"""
	Read PYSDUI_* settings, set up logging/telemetry, open the window.
	"""
	cfg = AppConfig.from_env()
	init_logging(cfg)
	init_telemetry(cfg, logger=get_app_logger("telemetry"))

	app = App(cfg=cfg)
	app.run()


if __name__ == "__main__":
	main()
