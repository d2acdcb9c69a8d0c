# content_admin/routes/__init__.py
from flask import Flask


def register_routes(app: Flask):
    """
    Registrar todos los blueprints de la carpeta routes.
    Llamá a register_routes(app) desde create_app().
    """
    # Import local para evitar problemas de import circular al inicializar la app
    from .auth import auth_bp
    from .content_routes import blog_bp, research_bp
    from .supplement_routes import supplement_bp
    from .user_routes import user_bp
    app.register_blueprint(auth_bp, url_prefix="/api")
    app.register_blueprint(blog_bp, url_prefix="/api")
    app.register_blueprint(research_bp, url_prefix="/api")
    app.register_blueprint(user_bp, url_prefix="/api/admin/users")
    app.register_blueprint(supplement_bp, url_prefix="/api/admin/supplements")
