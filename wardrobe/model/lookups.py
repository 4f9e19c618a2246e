from sqlalchemy import Column, ForeignKey, Integer, Text, UniqueConstraint

from wardrobe.database.base import WardrobeBase


class Category(WardrobeBase):
    __tablename__ = "categories"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(Text, nullable=False, unique=True)
    icon = Column(Text, nullable=True)  # Phosphor icon name
    sort_order = Column(Integer, nullable=False, default=0)


class Subcategory(WardrobeBase):
    __tablename__ = "subcategories"
    __table_args__ = (UniqueConstraint("category_id", "name"),)

    id = Column(Integer, primary_key=True, autoincrement=True)
    category_id = Column(Integer, ForeignKey("categories.id", ondelete="CASCADE"), nullable=False)
    name = Column(Text, nullable=False)
    sort_order = Column(Integer, nullable=False, default=0)


class Season(WardrobeBase):
    __tablename__ = "seasons"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(Text, nullable=False, unique=True)
    icon = Column(Text, nullable=True)


class Occasion(WardrobeBase):
    __tablename__ = "occasions"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(Text, nullable=False, unique=True)
    icon = Column(Text, nullable=True)


class Color(WardrobeBase):
    __tablename__ = "colors"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(Text, nullable=False, unique=True)
    hex = Column(Text, nullable=True)  # display hint only, e.g. '#1A1A1A'


class Material(WardrobeBase):
    __tablename__ = "materials"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(Text, nullable=False, unique=True)


class Pattern(WardrobeBase):
    __tablename__ = "patterns"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(Text, nullable=False, unique=True)


class SizeSystem(WardrobeBase):
    __tablename__ = "size_systems"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(Text, nullable=False, unique=True)  # e.g. 'Letter', "Women's Numeric"


class SizeValue(WardrobeBase):
    __tablename__ = "size_values"
    __table_args__ = (UniqueConstraint("size_system_id", "value"),)

    id = Column(Integer, primary_key=True, autoincrement=True)
    size_system_id = Column(Integer, ForeignKey("size_systems.id", ondelete="CASCADE"), nullable=False)
    value = Column(Text, nullable=False)  # e.g. 'M', '32', '10.5'
    sort_order = Column(Integer, nullable=False, default=0)
