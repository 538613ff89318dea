import importlib


def test_app_package_exports_main():
    module = importlib.import_module("app")

    assert hasattr(module, "main"), "app package should expose main entrypoint"


def test_every_navigation_link_has_a_renderer():
    from app.layout import NAV_LINKS
    from app.main import PAGE_RENDERERS

    assert {link.slug for link in NAV_LINKS} == set(PAGE_RENDERERS)
