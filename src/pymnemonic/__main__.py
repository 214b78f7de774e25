from pymnemonic.app import App
from pymnemonic.app.demo_menus import build_demo_menus


def main() -> None:
	app = App(title="pymnemonic preview", cfg={"log_level": "INFO"})
	app.menubar.set_menus(build_demo_menus(app))
	app.refresh_table()
	app.run()


if __name__ == "__main__":
	main()
