import enum

from sqlalchemy.orm import declarative_base


class ToDictMixin:
    def to_dict(self):
        result = {}
        for column in self.__table__.columns:
            value = getattr(self, column.key)
            if isinstance(value, enum.Enum):
                value = value.value
            result[column.key] = value
        return result


WardrobeBase = declarative_base(cls=ToDictMixin)
