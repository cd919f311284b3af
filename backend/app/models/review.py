from datetime import datetime, timezone


class Review:
    """Product review"""

    def __init__(self, id, product_id, author, rating, comment, date=None):
        self.id = id
        self.product_id = product_id
        self.author = author
        self.rating = rating
        self.comment = comment
        self.date = date or datetime.now(timezone.utc).date().isoformat()

    def to_dict(self):
        return {
            'id': self.id,
            'productId': self.product_id,
            'author': self.author,
            'rating': self.rating,
            'comment': self.comment,
            'date': self.date,
        }

    @staticmethod
    def from_dict(data):
        return Review(
            id=data.get('id'),
            product_id=data.get('productId'),
            author=data.get('author'),
            rating=data.get('rating'),
            comment=data.get('comment'),
            date=data.get('date'),
        )

    def __eq__(self, other):
        if not isinstance(other, Review):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    __hash__ = None

    def __repr__(self):
        return f"Review(id={self.id!r}, product_id={self.product_id!r}, rating={self.rating!r})"
