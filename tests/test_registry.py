import unittest

from regdoc.registry import Registry


class TestRegistry(unittest.TestCase):
    """Test the Registry class."""

    def test_register_and_create(self):
        """Registered classes should be creatable by key."""
        registry = Registry("test")

        @registry.register("foo")
        class Foo:
            pass

        instance = registry.create("foo")
        self.assertIsInstance(instance, Foo)

    def test_register_with_kwargs(self):
        """Create should pass kwargs to constructor."""
        registry = Registry("test")

        @registry.register("bar")
        class Bar:
            def __init__(self, title):
                self.title = title

        instance = registry.create("bar", title="CTRL")
        self.assertEqual(instance.title, "CTRL")

    def test_get_returns_class(self):
        registry = Registry("test")

        @registry.register("baz")
        class Baz:
            pass

        self.assertIs(registry.get("baz"), Baz)

    def test_keys_in_registration_order(self):
        registry = Registry("test")

        @registry.register("b")
        class B:
            pass

        @registry.register("a")
        class A:
            pass

        self.assertEqual(registry.keys(), ["b", "a"])

    def test_unknown_key_raises_keyerror(self):
        """Creating with unknown key should raise KeyError listing the keys."""
        registry = Registry("test")

        @registry.register("known")
        class Known:
            pass

        with self.assertRaises(KeyError) as ctx:
            registry.create("nonexistent")

        self.assertIn("nonexistent", str(ctx.exception))
        self.assertIn("Available: known", str(ctx.exception))

    def test_duplicate_key_raises_valueerror(self):
        """Registering duplicate key should raise ValueError."""
        registry = Registry("test")

        @registry.register("dup")
        class First:
            pass

        with self.assertRaises(ValueError) as ctx:
            @registry.register("dup")
            class Second:
                pass

        self.assertIn("dup", str(ctx.exception))
        self.assertIn("already registered", str(ctx.exception))

    def test_contains_and_len(self):
        registry = Registry("test")
        self.assertEqual(len(registry), 0)

        @registry.register("exists")
        class Exists:
            pass

        self.assertIn("exists", registry)
        self.assertNotIn("missing", registry)
        self.assertEqual(len(registry), 1)


class TestRendererRegistry(unittest.TestCase):
    """Test that renderer_registry is properly configured."""

    def test_renderer_registry_has_formats(self):
        from regdoc.renderers import renderer_registry
        for key in ("html", "markdown", "csv"):
            self.assertIn(key, renderer_registry)

    def test_create_passes_renderer_options(self):
        from regdoc.renderers import HtmlRenderer, renderer_registry
        renderer = renderer_registry.create("html", title="NAND registers")
        self.assertIsInstance(renderer, HtmlRenderer)
        self.assertEqual(renderer.title, "NAND registers")

    def test_renderers_carry_line_break(self):
        from regdoc.renderers import renderer_registry
        self.assertEqual(renderer_registry.create("html").line_break, "<br>")
        self.assertEqual(renderer_registry.create("markdown").line_break, "<br/>")
        self.assertEqual(renderer_registry.create("csv").line_break, "\n")


class TestLoaderRegistry(unittest.TestCase):
    def test_loader_registry_has_json(self):
        from regdoc.loader import loader_registry
        self.assertIn("json", loader_registry)


if __name__ == '__main__':
    unittest.main()
