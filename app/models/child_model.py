from sqlalchemy import Column, Integer, String, Text, Boolean, DateTime, ForeignKey, JSON, func
from sqlalchemy.orm import relationship
from config.database import Base

class Child(Base):
    __tablename__ = "children"

    id = Column(Integer, primary_key=True, index=True)
    parent_id = Column(Integer, ForeignKey("users.id"), nullable=False)  # FK para o pai/mãe
    name = Column(String, nullable=False)
    age = Column(Integer, nullable=False)
    grade = Column(String, nullable=True)
    interests = Column(JSON, nullable=False, default=list)  # lista na ordem em que foi digitada
    favorite_shows = Column(Text, nullable=True)
    hobbies = Column(Text, nullable=True)
    delivery_schedule = Column(String(20), nullable=False, default="daily")
    is_active = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    parent = relationship("User", back_populates="children")
    newsletters = relationship("Newsletter", back_populates="child", cascade="all, delete")
