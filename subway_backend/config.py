import os
from dotenv import load_dotenv

ver = "Development"

class Config:
	if os.environ.get("DOCKER") is None:
		basedir = os.path.abspath(os.path.dirname(__file__))
		load_dotenv(os.path.join(basedir, ".env"))

	DEBUG = os.environ.get("DOCKER") is None
	# Requests carry small JSON bodies only (line and section fields)
	MAX_CONTENT_LENGTH = 16 * 1024
	PORT = os.environ.get("PORT") or "8080"
	VERSION = os.environ.get("VERSION") or str(ver)
	#10 = Debug and 20 = Info
	LOG_LEVEL = os.environ.get("LOG_LEVEL") or "10"
	SECRET_KEY = os.environ.get("SECRET_KEY", "default-secret-key")
	# sqlite file holding stations, lines and their sections
	DATABASE_PATH = os.environ.get("DATABASE_PATH", "./subway.db")
