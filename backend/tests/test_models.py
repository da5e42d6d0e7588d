"""
Testes unitários dos models (sem banco).
"""

from catalog.models.author import Author
from catalog.models.book import Book
from catalog.models.category import Category


def make_book(**overrides) -> Book:
    data = dict(
        id=1,
        title="1984",
        author_name="George Orwell",
        publication_year=1949,
        is_available=True,
    )
    data.update(overrides)
    return Book(**data)


# ==========================================
# Book.set_author
# ==========================================

class TestSetAuthor:
    """Testes para Book.set_author."""

    def test_copies_author_name(self):
        """Deve copiar o nome do autor e registrar o livro em author.books."""
        author = Author(name="George Orwell", country="United Kingdom")
        book = Book(title="1984")

        book.set_author(author)

        assert book.author is author
        assert book.author_name == "George Orwell"
        assert book in author.books

    def test_name_not_resynced_after_rename(self):
        """author_name não acompanha renomeações posteriores do autor."""
        author = Author(name="Eric Blair")
        book = Book(title="1984")
        book.set_author(author)

        author.name = "George Orwell"

        assert book.author_name == "Eric Blair"

    def test_none_keeps_author_name(self):
        """Com None a referência some e o nome desnormalizado fica."""
        author = Author(name="George Orwell")
        book = Book(title="1984")
        book.set_author(author)

        book.set_author(None)

        assert book.author is None
        assert book.author_name == "George Orwell"
        assert book not in author.books


# ==========================================
# Associação Book <-> Category
# ==========================================

class TestCategoryAssociation:
    """Testes para add_category / remove_category."""

    def test_add_updates_both_sides(self):
        """Deve adicionar a categoria no livro e o livro na categoria."""
        book = make_book()
        fiction = Category(name="Fiction")

        book.add_category(fiction)

        assert fiction in book.categories
        assert book in fiction.books

    def test_add_twice_is_noop(self):
        """Adicionar a mesma categoria duas vezes não duplica nada."""
        book = make_book()
        fiction = Category(name="Fiction")

        book.add_category(fiction)
        book.add_category(fiction)

        assert len(book.categories) == 1
        assert len(fiction.books) == 1

    def test_remove_updates_both_sides(self):
        """Deve remover dos dois lados."""
        book = make_book()
        fiction = Category(name="Fiction")
        classic = Category(name="Classic")
        book.add_category(fiction)
        book.add_category(classic)

        book.remove_category(fiction)

        assert book.categories == {classic}
        assert book not in fiction.books
        assert book in classic.books

    def test_remove_absent_is_noop(self):
        """Remover categoria não associada não levanta erro."""
        book = make_book()
        fiction = Category(name="Fiction")

        book.remove_category(fiction)

        assert book.categories == set()
        assert fiction.books == []

    def test_unsaved_books_with_same_fields_kept_apart(self):
        """Remover de um livro novo não tira outro livro novo igual da categoria."""
        first = make_book(id=None)
        second = make_book(id=None)
        fiction = Category(name="Fiction")
        first.add_category(fiction)
        second.add_category(fiction)

        second.remove_category(fiction)

        assert len(fiction.books) == 1
        assert fiction.books[0] is first
        assert fiction in first.categories

    def test_category_names_sorted(self):
        book = make_book()
        for name in ("Fiction", "Classic", "Dystopian"):
            book.add_category(Category(name=name))

        assert book.category_names == ["Classic", "Dystopian", "Fiction"]


# ==========================================
# Igualdade
# ==========================================

class TestBookEquality:
    """Testes para Book.__eq__."""

    def test_equal_when_fields_match(self):
        assert make_book() == make_book()

    def test_categories_ignored(self):
        """Categorias não entram na comparação."""
        a = make_book()
        b = make_book()
        a.add_category(Category(name="Fiction"))

        assert a == b

    def test_differs_on_availability(self):
        assert make_book() != make_book(is_available=False)

    def test_differs_on_id(self):
        assert make_book() != make_book(id=2)

    def test_differs_on_author_name(self):
        assert make_book() != make_book(author_name="Eric Blair")

    def test_not_equal_to_other_types(self):
        assert make_book() != "1984"

    def test_equal_books_hash_equal(self):
        assert hash(make_book()) == hash(make_book())

    def test_unsaved_books_only_equal_to_themselves(self):
        book = make_book(id=None)

        assert book == book
        assert book != make_book(id=None)

    def test_hash_follows_current_fields(self):
        """O hash acompanha os campos mutáveis, como a igualdade."""
        book = make_book()
        before = hash(book)

        book.title = "Nineteen Eighty-Four"

        assert hash(book) != before
        assert hash(book) == hash(make_book(title="Nineteen Eighty-Four"))

    def test_repr_lists_categories(self):
        book = make_book()
        book.add_category(Category(name="Dystopian"))

        text = repr(book)

        assert "1984" in text
        assert "Dystopian" in text
