"""Build escaped HTML in 3 lines, no templates and no manual escaping."""

from safebuilder import SafeBuilder

b = SafeBuilder()
b.p("Hello <World> & friends", {"class": "greeting"})
print(b.output())
