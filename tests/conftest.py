pytest_plugins = ["persistent_dismissible.testing.fixtures"]
