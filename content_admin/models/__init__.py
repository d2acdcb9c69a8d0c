# content_admin/models/__init__.py
"""
Paquete de modelos de la aplicación.
Importa aquí los modelos para que puedan ser referenciados como:
from content_admin.models import BlogPost
"""
from .account import Account
from .content import BlogPost, ResearchDocument
from .session import AuthSession
from .supplement import Supplement

__all__ = ["Account", "AuthSession", "BlogPost", "ResearchDocument", "Supplement"]
