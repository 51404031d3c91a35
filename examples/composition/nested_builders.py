"""Compose builder output with Jinja-style safe markup.

Shows that untrusted text is escaped once, trusted markup passes through,
and one builder's output can be embedded into another without being
escaped again.

Run::

    python examples/composition/nested_builders.py

"""

from markupsafe import Markup, escape

from safebuilder import SafeBuilder

# Simulated user content (could come from DB, API, untrusted input)
comments = [
    "First!",
    "<script>alert('xss')</script>",
    "Fish & Chips",
]

# A fragment rendered elsewhere and already trusted
badge = Markup('<span class="badge">new</span>')

items = SafeBuilder(indent=False)
items.li(comments, {"class": "comment"})

page = SafeBuilder()
page.section(
    lambda b: (
        b.h2(lambda b: escape("Comments & replies ") + badge),
        b.ul(items),
        b.input({"type": "submit", "disabled": None}),
    ),
    id="comments",
)

print(page.output())
