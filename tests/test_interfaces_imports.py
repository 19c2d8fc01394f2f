def test_can_import_all_protocols():
    # Import must succeed and expose the expected names
    import citebuilder.core.interfaces as I

    assert hasattr(I, "LoggerFactoryProtocol")
    assert hasattr(I, "LoggerLikeProtocol")
    assert hasattr(I, "TemplateEngineProtocol")


def test_default_engine_satisfies_protocol():
    from citebuilder import template_engine_factory
    from citebuilder.core.interfaces import TemplateEngineProtocol

    assert isinstance(template_engine_factory(), TemplateEngineProtocol)


def test_logger_satisfies_sink_protocol():
    from citebuilder.core.interfaces import LoggerLikeProtocol
    from citebuilder.logging import DefaultLoggerFactory

    assert isinstance(DefaultLoggerFactory().get_logger("sink"), LoggerLikeProtocol)
