from app.models.user import User
from app.models.property import Property
from app.models.favorite import Favorite
from app.models.message import Message
from app.models.neighborhood import Neighborhood
from app.models.notification import Notification
from app.models.review import Review

__all__ = ["User", "Property", "Favorite", "Message", "Neighborhood", "Notification", "Review"]
