# content_admin/auth/passwords.py
from werkzeug.security import check_password_hash, generate_password_hash


def hash_password(plain_password):
    if not plain_password:
        raise ValueError("Password is empty.")
    return generate_password_hash(plain_password)


def verify_password(plain_password, password_hash):
    if not plain_password or not password_hash:
        return False
    try:
        return check_password_hash(password_hash, plain_password)
    except ValueError:
        # Malformed stored hash
        return False
