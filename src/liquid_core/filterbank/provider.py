"""Base class for filter provider instances."""

from liquid_core.template import TemplateContext


class FilterProvider:
    """Optional base class for objects whose public methods are filters.

    Subclass, define public methods taking the filtered value first, and pass
    an instance to Filterbank.add_filter(). The filter bank assigns
    ``context`` before any filter is invoked.

    Example:
        class Greetings(FilterProvider):
            def greet(self, value, punctuation="!"):
                site = self.context.get("site.name", "")
                return f"Hello {value} from {site}{punctuation}"
    """

    context: TemplateContext | None = None
