"""
Ponto de entrada da demonstração do catálogo.

Abre o banco, cria os dados de exemplo e executa uma sequência fixa de
buscas, atualizações e remoções, logando cada resultado.

Uso:
    python -m catalog.main
"""

import sys

from sqlalchemy.orm import Session

from catalog.core.config import get_settings
from catalog.core.exceptions import ConnectionInitError, TransactionError
from catalog.core.logging import get_logger, setup_logging
from catalog.db.seed import seed_catalog
from catalog.db.session import create_session_factory, init_database
from catalog.services.author import AuthorService
from catalog.services.book import BookService

logger = get_logger(__name__)


def run_demo(db: Session) -> None:
    """
    Executa o roteiro de demonstração sobre uma sessão aberta.

    Raises:
        TransactionError: Falha em alguma operação de escrita
    """
    seed = seed_catalog(db)
    books = BookService(db)
    authors = AuthorService(db)

    orwell = seed.authors["George Orwell"]
    dystopian = seed.categories["Dystopian"]
    science_fiction = seed.categories["Science Fiction"]
    nineteen_eighty_four = seed.books["1984"]
    animal_farm = seed.books["Animal Farm"]
    island = seed.books["Island"]

    # Busca por ID
    found = books.find_book_by_id(nineteen_eighty_four.id)
    if found is not None:
        logger.info(f"Livro encontrado: {found!r}")

    # Busca por autor
    for book in books.find_books_by_author(orwell.id):
        logger.info(f"Livro de {orwell.name}: {book.title}")

    # Busca por categoria, antes e depois de adicionar uma nova
    for book in books.find_books_by_category(dystopian.id):
        logger.info(f"Livro em '{dystopian.name}': {book.title}")

    books.add_category(nineteen_eighty_four.id, science_fiction.id)
    for book in books.find_books_by_category(science_fiction.id):
        logger.info(f"Livro em '{science_fiction.name}': {book.title}")

    detail = books.load_book_with_categories(nineteen_eighty_four.id)
    if detail is not None:
        logger.info(
            f"'{detail.title}' tem {len(detail.categories)} categorias: "
            f"{', '.join(detail.categories)}"
        )

    # Atualização de título e disponibilidade
    books.update_book(animal_farm.id, "Animal Farm: A Fairy Story", False)
    available = books.find_available_books()
    logger.info(f"Livros disponíveis: {', '.join(sorted(b.title for b in available))}")

    # Remoção (a segunda chamada não faz nada)
    island_id = island.id
    books.delete_book(island_id)
    if books.find_book_by_id(island_id) is None:
        logger.info(f"Livro {island_id} não existe mais")
    if not books.delete_book(island_id):
        logger.info(f"Livro {island_id} já havia sido removido")

    huxley = authors.load_author_with_books(seed.authors["Aldous Huxley"].id)
    if huxley is not None:
        logger.info(
            f"{huxley.name} tem {len(huxley.books)} livro(s): "
            f"{', '.join(b.title for b in huxley.books)}"
        )


def main() -> int:
    """
    Executa a demonstração.

    Returns:
        Código de saída: 0 em sucesso, 1 em falha de conexão ou transação
    """
    setup_logging()
    settings = get_settings()
    logger.info(f"Iniciando {settings.APP_NAME} em ambiente {settings.ENVIRONMENT}")

    try:
        engine = init_database(settings)
    except ConnectionInitError:
        logger.exception("Erro ao inicializar a conexão com o banco")
        return 1

    session_factory = create_session_factory(engine)
    try:
        with session_factory() as db:
            run_demo(db)
    except TransactionError as e:
        logger.error(f"Demonstração interrompida: {e}")
        return 1
    finally:
        engine.dispose()
        logger.info(f"Encerrando {settings.APP_NAME}")

    return 0


def run() -> None:
    """Entrada do console script catalog-demo."""
    sys.exit(main())


if __name__ == "__main__":
    run()
