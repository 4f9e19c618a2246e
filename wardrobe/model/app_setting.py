from sqlalchemy import Column, Text

from wardrobe.database.base import WardrobeBase


class AppSetting(WardrobeBase):
    __tablename__ = "app_settings"

    key = Column(Text, primary_key=True)
    value = Column(Text, nullable=False)
