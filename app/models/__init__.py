# Fleet Booking — Database Models
# Import all models here for SQLAlchemy discovery

from app.models.user import User         # noqa
from app.models.cab import Cab           # noqa
from app.models.booking import Booking   # noqa
from app.models.note import Note         # noqa
