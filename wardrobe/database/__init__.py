from .base import WardrobeBase
from .database import Database
