from app.db.base_class import Base
from app.models.document import DocumentMixin


class SubmittedAssignment(DocumentMixin, Base):
    __tablename__ = "submitted_assignments"
