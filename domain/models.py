from dataclasses import dataclass

SEPARATOR_WIDTH = 30


@dataclass
class Post:
    """Social media post."""
    author: str
    content: str
    likes: int = 0

    def like(self):
        """Register one more like."""
        self.likes += 1

    def display(self):
        """Print the post with a separator line below it."""
        print(f"Post by {self.author}:")
        print(f'"{self.content}"')
        print(f"Likes: {self.likes}")
        print("-" * SEPARATOR_WIDTH)


@dataclass
class Product:
    """Product entity. Name and price are fixed once set."""
    name: str
    price: float
    quantity: int = 1

    def __setattr__(self, key, value):
        if key in ("name", "price") and key in self.__dict__:
            raise AttributeError(f"Product {key} is read-only")
        super().__setattr__(key, value)

    @property
    def line_total(self) -> float:
        return self.price * self.quantity
