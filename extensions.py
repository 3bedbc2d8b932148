from flask_cors import CORS
from flask_login import LoginManager
from flask_socketio import SocketIO
from flask_sqlalchemy import SQLAlchemy

from realtime import Broadcaster

# Extensions are created unbound and attached to the app in create_app()

# Database
db = SQLAlchemy()

# Token authentication (request_loader lives in tokens.py)
login_manager = LoginManager()

# Real-time transport and the asset event fan-out on top of it
socketio = SocketIO()
broadcaster = Broadcaster()

cors = CORS()
