from pytest_archon import archrule


def test_compiler_is_backend_agnostic() -> None:
    """
    The compiler pipeline must not know about any persistence backend.
    Translation lives in ``clubportal_filtering.adapters`` only.
    """
    (
        archrule("compiler_is_backend_agnostic")
        .match("clubportal_filtering*")
        .exclude("clubportal_filtering.adapters*")
        .should_not_import("clubportal_filtering.adapters*")
        .should_not_import("sqlalchemy*")
        .check("clubportal_filtering")
    )


def test_mongo_adapter_has_no_driver_dependency() -> None:
    """
    The Mongo adapter only builds documents; it must not pull in SQLAlchemy.
    """
    (
        archrule("mongo_adapter_isolation")
        .match("clubportal_filtering.adapters.mongo")
        .should_not_import("sqlalchemy*")
        .should_not_import("clubportal_filtering.adapters.sqla")
        .check("clubportal_filtering")
    )


def test_primitives_isolation() -> None:
    """
    Operators and the tokenizer are the lowest level.
    They must not import the compiler, registry or configuration.
    """
    (
        archrule("primitives_isolation")
        .match("clubportal_filtering.operators")
        .match("clubportal_filtering.tokenizer")
        .should_not_import("clubportal_filtering.compiler")
        .should_not_import("clubportal_filtering.registry")
        .should_not_import("clubportal_filtering.config")
        .check("clubportal_filtering")
    )
