"""Tests for render_tag and TagCall."""

from __future__ import annotations


class TestRenderTag:
    """Tests for the core rendering function."""

    def test_render_into_buffer(self) -> None:
        """render_tag writes into the given buffer and returns it."""
        from safebuilder import BuilderConfig, MarkupBuffer, SafeBuilder
        from safebuilder.renderer import TagCall, render_tag

        buffer = MarkupBuffer()
        result = render_tag(
            SafeBuilder(), buffer, BuilderConfig(indent=False), TagCall(tag="p", content="x")
        )

        assert result is buffer
        assert buffer == "<p>x</p>"

    def test_options_applied(self) -> None:
        from safebuilder import BuilderConfig, MarkupBuffer, SafeBuilder, TagOptions
        from safebuilder.renderer import TagCall, render_tag

        buffer = MarkupBuffer()
        call = TagCall(tag="rect", options=TagOptions(namespace="svg", indent=False))
        render_tag(SafeBuilder(), buffer, BuilderConfig(), call)

        assert buffer == "<svg:rect/>"

    def test_body_gets_builder(self) -> None:
        """The body callback receives the builder, not the buffer."""
        from safebuilder import BuilderConfig, MarkupBuffer, SafeBuilder
        from safebuilder.renderer import TagCall, render_tag

        builder = SafeBuilder()
        received = []
        buffer = MarkupBuffer()
        call = TagCall(tag="div", body=lambda b: received.append(b))
        render_tag(builder, buffer, BuilderConfig(indent=False), call)

        assert received == [builder]
        assert buffer == "<div/>"

    def test_appends_after_existing_output(self) -> None:
        from safebuilder import BuilderConfig, MarkupBuffer, SafeBuilder
        from safebuilder.renderer import TagCall, render_tag

        buffer = MarkupBuffer().append("<!DOCTYPE html>")
        render_tag(SafeBuilder(), buffer, BuilderConfig(indent=False), TagCall(tag="html"))

        assert buffer == "<!DOCTYPE html><html/>"

    def test_tag_call_defaults(self) -> None:
        from safebuilder import TagCall, TagOptions

        call = TagCall(tag="a")
        assert call.content is None
        assert call.attributes is None
        assert call.options == TagOptions()
        assert call.body is None


class TestDocument:
    """A complete document built through the public API."""

    def test_html_page(self) -> None:
        from markupsafe import Markup

        from safebuilder import SafeBuilder

        b = SafeBuilder()
        b.append_raw("<!DOCTYPE html>\n")
        b.html(
            lambda b: (
                b.head(lambda b: b.title("Q&A")),
                b.body(
                    lambda b: (
                        b.h1("Questions <and> answers"),
                        b.ul(["one", "two"], lambda b: b.li("item", class_="q")),
                        b.p(Markup("<em>trusted</em>")),
                        b.input({"type": "checkbox", "checked": None}),
                    )
                ),
            )
        )

        assert b.output() == (
            "<!DOCTYPE html>\n"
            "<html><head><title>Q&amp;A</title>\n"
            "</head>\n"
            "<body><h1>Questions &lt;and&gt; answers</h1>\n"
            '<ul><li class="q">item</li>\n'
            '<li class="q">item</li>\n'
            "</ul>\n"
            "<p><em>trusted</em></p>\n"
            '<input type="checkbox" checked/>\n'
            "</body>\n"
            "</html>\n"
        )
