# content_admin/utils/content.py
"""
Lookup and persistence for content records (blog posts, research documents).

Records are addressable by numeric id or by slug. The id is always tried
first: a slug made only of digits is unreachable through ``resolve`` when a
record with that id exists.
"""
import logging
import re

from slugify import slugify

from content_admin.errors import NotFound, ValidationError
from content_admin.extensions import db
from content_admin.models.content import utcnow
from content_admin.utils.persistence import commit

logger = logging.getLogger(__name__)

_ID_RE = re.compile(r"-?[0-9]+")
# Integer primary keys are 32-bit on PostgreSQL
_MAX_ID = 2 ** 31 - 1
_SLUG_DISALLOWED = r"[^a-z0-9]+"


def slugify_title(title):
    """``"Hello World!"`` -> ``"hello-world"``."""
    # Commas count as separators: "1,000" -> "1-000"
    return slugify(title or "", lowercase=True, regex_pattern=_SLUG_DISALLOWED,
                   replacements=[[",", "-"]])


def parse_id(identifier):
    """Base-10 integer with nothing left over, else ``None``."""
    if identifier is None or not _ID_RE.fullmatch(identifier):
        return None
    value = int(identifier)
    if abs(value) > _MAX_ID:
        return None
    return value


def resolve(identifier, model):
    record = None
    record_id = parse_id(identifier)
    if record_id is not None:
        record = db.session.get(model, record_id)
    if record is None:
        record = model.query.filter_by(slug=identifier).first()
    if record is None:
        raise NotFound(f"{model.__name__} not found")
    return record


def _slug_for(title):
    slug = slugify_title(title)
    if not slug:
        raise ValidationError("Title must contain at least one letter or digit")
    return slug


def create_record(model, data):
    data = dict(data)
    if not data.get("slug"):
        data["slug"] = _slug_for(data["title"])

    now = utcnow()
    record = model(created_at=now, updated_at=now, **data)
    db.session.add(record)
    commit(f"create {model.__tablename__}", data["slug"])
    logger.info("Created %s id=%s slug=%s", model.__tablename__, record.id, record.slug)
    return record


def update_record(model, record_id, data):
    """Apply a partial update. ``None`` if ``record_id`` does not exist."""
    record = db.session.get(model, record_id)
    if record is None:
        return None

    data = dict(data)
    if not data.get("slug"):
        data.pop("slug", None)
        if "title" in data:
            data["slug"] = _slug_for(data["title"])

    for field, value in data.items():
        setattr(record, field, value)
    record.updated_at = utcnow()

    commit(f"update {model.__tablename__}", record_id)
    logger.info("Updated %s id=%s slug=%s", model.__tablename__, record.id, record.slug)
    return record


def delete_record(model, record_id):
    record = db.session.get(model, record_id)
    if record is None:
        return False
    db.session.delete(record)
    commit(f"delete {model.__tablename__}", record_id)
    logger.info("Deleted %s id=%s", model.__tablename__, record_id)
    return True
