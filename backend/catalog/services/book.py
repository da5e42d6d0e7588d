"""
Service para operações de Book.

Toda escrita roda dentro de transaction(): commit ao final do bloco,
rollback e TransactionError em qualquer falha. Buscas não levantam
exceção quando nada é encontrado: retornam None ou lista vazia.
"""

from sqlalchemy.orm import Session

from catalog.core.logging import get_logger
from catalog.db.session import transaction
from catalog.models.author import Author
from catalog.models.book import Book
from catalog.repositories.book import BookRepository
from catalog.repositories.category import CategoryRepository
from catalog.schemas.book import BookCreate, BookDetail, BookUpdate

logger = get_logger(__name__)


class BookService:
    """Service para operações de Book."""

    def __init__(self, db: Session):
        self.db = db
        self.repo = BookRepository(db)
        self.category_repo = CategoryRepository(db)

    # ==========================================
    # Escrita
    # ==========================================

    def create_book(
        self,
        title: str,
        author: Author | None,
        publication_year: int | None = None,
    ) -> Book:
        """
        Cria livro disponível, copiando o nome do autor.

        O livro passa a constar em author.books.

        Raises:
            TransactionError: Título vazio ou falha ao gravar, por
                exemplo sem autor (author_name é obrigatório)
        """
        with transaction(self.db, "create_book"):
            data = BookCreate(title=title, publication_year=publication_year)
            book = Book(
                title=data.title,
                publication_year=data.publication_year,
                is_available=True,
            )
            book.set_author(author)
            self.repo.add(book)
        logger.info(f"Livro criado: {book.title} de {book.author_name} (ID: {book.id})")
        return book

    def update_book(self, book_id: int, new_title: str, is_available: bool) -> Book | None:
        """
        Atualiza título e disponibilidade.

        Returns:
            Livro atualizado, ou None se o ID não existir (nada é alterado)

        Raises:
            TransactionError: Título vazio ou falha ao gravar
        """
        with transaction(self.db, "update_book"):
            book = self.repo.get_by_id(book_id)
            if book is None:
                return None
            data = BookUpdate(title=new_title, is_available=is_available)
            book.title = data.title
            book.is_available = data.is_available
        logger.info(
            f"Livro atualizado: {book.title} (ID: {book.id}, "
            f"disponível: {book.is_available})"
        )
        return book

    def delete_book(self, book_id: int) -> bool:
        """
        Remove o livro e suas linhas na tabela de junção.

        O livro sai de author.books antes do delete; category.books das
        categorias afetadas é recarregado do banco no próximo acesso.

        Returns:
            True se removido, False se o ID não existir
        """
        with transaction(self.db, "delete_book"):
            book = self.repo.get_by_id(book_id)
            if book is None:
                return False
            author = book.author
            if author is not None and book in author.books:
                author.books.remove(book)
            categories = list(book.categories)
            self.repo.delete(book)
            for category in categories:
                self.db.expire(category, ["books"])
        logger.info(f"Livro removido: {book.title} (ID: {book_id})")
        return True

    def add_category(self, book_id: int, category_id: int) -> Book | None:
        """
        Associa categoria ao livro e grava a linha de junção.

        Returns:
            Livro atualizado, ou None se livro ou categoria não existir
        """
        with transaction(self.db, "add_category"):
            book = self.repo.get_by_id(book_id)
            category = self.category_repo.get_by_id(category_id)
            if book is None or category is None:
                return None
            book.add_category(category)
        logger.info(f"Categoria '{category.name}' adicionada a '{book.title}'")
        return book

    def remove_category(self, book_id: int, category_id: int) -> Book | None:
        """
        Desassocia categoria do livro e remove a linha de junção.

        Returns:
            Livro atualizado, ou None se livro ou categoria não existir
        """
        with transaction(self.db, "remove_category"):
            book = self.repo.get_by_id(book_id)
            category = self.category_repo.get_by_id(category_id)
            if book is None or category is None:
                return None
            book.remove_category(category)
        logger.info(f"Categoria '{category.name}' removida de '{book.title}'")
        return book

    # ==========================================
    # Leitura
    # ==========================================

    def find_book_by_id(self, book_id: int) -> Book | None:
        """Busca livro por ID. Retorna None se não existir."""
        return self.repo.get_by_id(book_id)

    def load_book_with_categories(self, book_id: int) -> BookDetail | None:
        """
        Busca livro com autor e categorias carregados de forma explícita.

        Returns:
            BookDetail independente da sessão, ou None
        """
        book = self.repo.get_with_categories(book_id)
        if book is None:
            return None
        return BookDetail(
            id=book.id,
            title=book.title,
            author_name=book.author_name,
            publication_year=book.publication_year,
            is_available=book.is_available,
            author_id=book.author_id,
            author_country=book.author.country if book.author else None,
            categories=book.category_names,
        )

    def find_available_books(self) -> list[Book]:
        return self.repo.get_available()

    def find_books_by_author(self, author_id: int) -> list[Book]:
        return self.repo.get_by_author(author_id)

    def find_books_by_category(self, category_id: int) -> list[Book]:
        return self.repo.get_by_category(category_id)
