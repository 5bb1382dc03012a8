from unittest.mock import MagicMock, patch

import punq

from creational.catalog import ExampleRunner, MarkdownRenderer, PatternCatalog
from creational.core.app import AppContext, initialize_app
from creational.core.config import AppSettings
from creational.core.container import create_container


class TestAppContext:
    @patch("creational.core.app.get_settings")
    def test_create(self, mock_get_settings):
        """Test the create method of AppContext."""
        mock_settings = MagicMock()
        mock_get_settings.return_value = mock_settings

        with patch("creational.core.app.AppContext.__init__", return_value=None) as mock_init:
            app_context = AppContext.create()
            mock_init.assert_called_once_with(mock_settings)
            assert isinstance(app_context, AppContext)

    @patch("creational.core.app.create_container")
    @patch("creational.core.app.setup_logging")
    def test_init(self, mock_setup_logging, mock_create_container):
        """Test the __init__ method of AppContext."""
        mock_settings = MagicMock()

        app_context = AppContext(mock_settings)

        mock_setup_logging.assert_called_once_with(mock_settings)
        mock_create_container.assert_called_once_with(mock_settings)
        assert app_context.settings == mock_settings
        assert app_context.container is mock_create_container.return_value


@patch("creational.core.app.AppContext.create")
def test_initialize_app(mock_create):
    initialize_app()
    mock_create.assert_called_once()


def test_container_resolves_catalog_services(settings):
    container = create_container(settings)

    assert isinstance(container, punq.Container)
    assert container.resolve(AppSettings) is settings

    catalog = container.resolve(PatternCatalog)
    assert catalog is container.resolve(PatternCatalog)
    assert len(catalog) == 5

    runner = container.resolve(ExampleRunner)
    assert runner is container.resolve(ExampleRunner)
    assert runner.catalog is catalog

    renderer = container.resolve(MarkdownRenderer)
    assert renderer.catalog is catalog
    assert renderer.runner is runner
    assert renderer.settings is settings.docs
