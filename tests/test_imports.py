def test_import_rpcore_package() -> None:
    import importlib

    module = importlib.import_module("rpcore")
    assert module.__version__


def test_import_builder_has_no_side_effects() -> None:
    from rpcore.domain.racial_traits_builder import DEFAULT_COERCERS, build_subrace

    assert DEFAULT_COERCERS is not None
    assert callable(build_subrace)
