from sqlalchemy import MetaData
from sqlalchemy.orm import declarative_base

# Métadonnées partagées
metadata = MetaData()

# Classe de base déclarative
Base = declarative_base(metadata=metadata)
