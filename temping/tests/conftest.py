from temping.testing.pytest_plugin import temping  # noqa: F401
