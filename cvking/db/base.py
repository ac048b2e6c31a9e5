from sqlalchemy.orm import declarative_base

Base = declarative_base()

# Note: all models import Base from this module; cvking.db.models registers them on Base.metadata
