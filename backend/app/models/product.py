from datetime import datetime, timezone


def utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat(timespec='milliseconds').replace('+00:00', 'Z')


class Product:
    """Catalog product"""

    # Fields a caller may set on create/update. rating and review_count are
    # derived from reviews and never taken from input.
    EDITABLE_FIELDS = {
        'name': 'name',
        'description': 'description',
        'price': 'price',
        'category': 'category',
        'image': 'image',
        'inStock': 'in_stock',
    }

    def __init__(self, id, name, description, price, category, image,
                 in_stock=True, rating=0, review_count=0,
                 created_at=None, updated_at=None):
        self.id = id
        self.name = name
        self.description = description
        self.price = price
        self.category = category
        self.image = image
        self.in_stock = in_stock
        self.rating = rating
        self.review_count = review_count
        self.created_at = created_at or utc_now_iso()
        self.updated_at = updated_at

    def apply_changes(self, data):
        """Merge editable fields from a wire-format dict, stamp updated_at."""
        for key, attr in self.EDITABLE_FIELDS.items():
            if key in data:
                setattr(self, attr, data[key])
        self.updated_at = utc_now_iso()
        return self

    def update_rating(self, rating, review_count):
        """Write back aggregates computed from reviews."""
        self.rating = rating
        self.review_count = review_count
        self.updated_at = utc_now_iso()
        return self

    def to_dict(self):
        """Wire format (camelCase keys)"""
        data = {
            'id': self.id,
            'name': self.name,
            'description': self.description,
            'price': self.price,
            'category': self.category,
            'image': self.image,
            'inStock': self.in_stock,
            'rating': self.rating,
            'reviewCount': self.review_count,
            'createdAt': self.created_at,
        }
        if self.updated_at:
            data['updatedAt'] = self.updated_at
        return data

    @staticmethod
    def from_dict(data):
        """Build a product from a wire-format dict"""
        return Product(
            id=data.get('id'),
            name=data.get('name'),
            description=data.get('description'),
            price=data.get('price'),
            category=data.get('category'),
            image=data.get('image'),
            in_stock=data.get('inStock', True),
            rating=data.get('rating', 0),
            review_count=data.get('reviewCount', 0),
            created_at=data.get('createdAt'),
            updated_at=data.get('updatedAt'),
        )

    def __eq__(self, other):
        if not isinstance(other, Product):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    __hash__ = None

    def __repr__(self):
        return f"Product(id={self.id!r}, name={self.name!r}, price={self.price!r})"
