from flask_sqlalchemy import SQLAlchemy
from flask_cors import CORS
from flask_migrate import Migrate

from dubytrack.services.sheets import SheetsMirror

db = SQLAlchemy()
cors = CORS()
migrate = Migrate()
sheets = SheetsMirror()
