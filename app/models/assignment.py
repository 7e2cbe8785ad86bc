from app.db.base_class import Base
from app.models.document import DocumentMixin


class Assignment(DocumentMixin, Base):
    __tablename__ = "assignments"
