pytest_plugins = ["tests.fixtures.store_fixtures"]
