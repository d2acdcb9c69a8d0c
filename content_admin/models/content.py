from datetime import datetime, timezone

from content_admin.extensions import db


def utcnow():
    return datetime.now(timezone.utc)


class ContentMixin:
    """Columns shared by blog posts and research documents."""

    id = db.Column(db.Integer, primary_key=True)

    # Clave alternativa legible: /api/blog/<slug>
    slug = db.Column(db.String(255), unique=True, nullable=False)
    title = db.Column(db.String(255), nullable=False)
    content = db.Column(db.Text, nullable=False)

    tags = db.Column(db.JSON, nullable=False, default=list)
    image_urls = db.Column(db.JSON, nullable=False, default=list)
    thumbnail_url = db.Column(db.String, nullable=True)

    # ⏰ Timestamps, assigned by the server only
    created_at = db.Column(db.DateTime, nullable=False, default=utcnow)
    updated_at = db.Column(db.DateTime, nullable=False, default=utcnow)

    def _base_dict(self):
        return {
            "id": self.id,
            "slug": self.slug,
            "title": self.title,
            "content": self.content,
            "tags": list(self.tags or []),
            "imageUrls": list(self.image_urls or []),
            "thumbnailUrl": self.thumbnail_url,
            "createdAt": self.created_at.isoformat() if self.created_at else None,
            "updatedAt": self.updated_at.isoformat() if self.updated_at else None,
        }

    def __repr__(self):
        return f"<{type(self).__name__} {self.slug}>"


class BlogPost(ContentMixin, db.Model):
    __tablename__ = "blog_posts"

    excerpt = db.Column(db.String(500), nullable=True)
    published = db.Column(db.Boolean, nullable=False, default=False)

    # Authorship is optional metadata
    author_id = db.Column(db.Integer, db.ForeignKey("users.id", ondelete="SET NULL"), nullable=True)

    def to_dict(self):
        data = self._base_dict()
        data.update({
            "excerpt": self.excerpt,
            "published": bool(self.published),
            "authorId": self.author_id,
        })
        return data


class ResearchDocument(ContentMixin, db.Model):
    __tablename__ = "research_documents"

    summary = db.Column(db.Text, nullable=False)
    authors = db.Column(db.String(500), nullable=True)
    file_url = db.Column(db.String, nullable=True)

    def to_dict(self):
        data = self._base_dict()
        data.update({
            "summary": self.summary,
            "authors": self.authors,
            "fileUrl": self.file_url,
        })
        return data
