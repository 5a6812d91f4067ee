"""Tests for utility modules."""


class TestLogger:
    def test_get_logger(self) -> None:
        from coolex.utils.logger import get_logger

        assert get_logger("mymodule").name == "coolex.mymodule"

    def test_logger_with_coolex_prefix(self) -> None:
        from coolex.utils.logger import get_logger

        assert get_logger("coolex.lexer").name == "coolex.lexer"

    def test_logger_name_starting_with_coolex_not_submodule(self) -> None:
        from coolex.utils.logger import get_logger

        assert get_logger("coolex_other").name == "coolex.coolex_other"

    def test_logger_exact_coolex_name(self) -> None:
        from coolex.utils.logger import get_logger

        assert get_logger("coolex").name == "coolex"
