from sqlalchemy import Column, Integer, String
from hr_master.database import Base

class AdminAccount(Base):
    __tablename__ = "admin_auth"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String(100), unique=True, nullable=False)
    password = Column(String(255), nullable=False)  # legacy plaintext credential

    def __repr__(self):
        return f"<AdminAccount {self.username}>"
