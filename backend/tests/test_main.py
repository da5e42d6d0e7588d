"""
Testes do seed e do driver de demonstração.
"""

import logging
from unittest.mock import patch

from sqlalchemy.engine import Engine

from catalog.core.exceptions import TransactionError
from catalog.core.logging import get_logger, setup_logging
from catalog.db.seed import AUTHORS, BOOKS, CATEGORIES, seed_catalog
from catalog.main import main, run_demo
from catalog.services.author import AuthorService


class TestSeed:
    """Testes para seed_catalog."""

    def test_creates_sample_data(self, test_db, book_service):
        result = seed_catalog(test_db)

        assert len(result.authors) == len(AUTHORS) == 3
        assert len(result.categories) == len(CATEGORIES) == 5
        assert len(result.books) == len(BOOKS) == 5
        assert book_service.repo.count() == 5

    def test_categories_attached(self, test_db, book_service):
        result = seed_catalog(test_db)
        dystopian = result.categories["Dystopian"]

        books = book_service.find_books_by_category(dystopian.id)

        assert [b.title for b in books] == ["1984"]
        assert result.books["1984"].category_names == ["Classic", "Dystopian", "Fiction"]


class TestRunDemo:
    """Testes para o roteiro de demonstração."""

    def test_final_state(self, test_db, book_service, category_service):
        run_demo(test_db)

        titles = sorted(b.title for b in book_service.repo.get_all())
        assert "Island" not in titles
        assert "Animal Farm: A Fairy Story" in titles

        available = {b.title for b in book_service.find_available_books()}
        assert "Animal Farm: A Fairy Story" not in available

        science_fiction = category_service.find_category_by_name("Science Fiction")
        in_sf = sorted(b.title for b in book_service.find_books_by_category(science_fiction.id))
        assert in_sf == ["1984", "Brave New World"]


class TestMain:
    """Testes para main (código de saída e saída)."""

    def test_success(self, settings_env, restore_logging, capsys):
        settings_env(DATABASE_URL="sqlite:///:memory:", LOG_LEVEL="INFO")

        assert main() == 0

        out = capsys.readouterr().out
        assert "Autor criado: George Orwell" in out
        assert "Livro removido: Island" in out

    def test_transaction_failure(self, settings_env, restore_logging, capsys):
        """Falha numa escrita interrompe a demo com código 1 e fecha o engine."""
        settings_env(DATABASE_URL="sqlite:///:memory:")
        error = TransactionError("create_author", "disk full")

        with patch.object(AuthorService, "create_author", side_effect=error), \
                patch.object(Engine, "dispose", autospec=True) as dispose:
            assert main() == 1

        dispose.assert_called_once()
        err = capsys.readouterr().err
        assert "Demonstração interrompida" in err
        assert "disk full" in err

    def test_connection_failure(self, settings_env, restore_logging, capsys, tmp_path):
        url = f"sqlite:///{tmp_path / 'missing' / 'catalog.db'}"
        settings_env(DATABASE_URL=url)

        assert main() == 1

        err = capsys.readouterr().err
        assert "Erro ao inicializar" in err
        assert "ConnectionInitError" in err


class TestLogging:
    """Testes para setup_logging."""

    def test_info_to_stdout_error_to_stderr(self, settings_env, restore_logging, capsys):
        setup_logging("INFO")
        logger = get_logger("catalog.test")

        logger.info("progresso")
        logger.error("falhou")

        captured = capsys.readouterr()
        assert "progresso" in captured.out
        assert "progresso" not in captured.err
        assert "falhou" in captured.err
        assert "falhou" not in captured.out

    def test_sqlalchemy_quiet_by_default(self, settings_env, restore_logging, monkeypatch):
        monkeypatch.delenv("DATABASE_ECHO", raising=False)
        setup_logging("DEBUG")

        assert logging.getLogger("sqlalchemy.engine").level == logging.WARNING
