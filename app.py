import sys
from PySide6.QtWidgets import QApplication
from BackEnd.core import config
from BackEnd.core.log import configure_logging
from BackEnd.core.paths import workbook_path
from BackEnd.repos import workbook_repo
from BackEnd.repos.session_store import SessionStore
from BackEnd.services.timer_service import TimerService
from FrontEnd.ui_main import MainWindow

def build_service(path=None):
	"""Load (or create) today's tab and wrap it in a TimerService."""
	path = path or workbook_path()
	sessions = workbook_repo.load_or_initialize(path, config.TABLE_COUNT, config.DEFAULT_HOURLY_RATE)
	return TimerService(SessionStore(sessions), path)

def main():
	configure_logging()
	app = QApplication(sys.argv)
	service = build_service()
	win = MainWindow(service)
	win.show()
	sys.exit(app.exec())

if __name__ == "__main__":
	main()
