"""
Problems raised by narigama_maybe.

Every Problem carries a short `title`, a machine readable `kind`, and an
optional `detail` and `context` describing the specific occurrence.
"""


class ProblemMeta(type):
    """The Problem Metaclass, this will validate your Problems."""

    def __new__(cls, class_name, parents, attrs):  # noqa: D102
        # create the class
        _cls = type.__new__(cls, class_name, parents, attrs)

        # don't validate Problem
        if class_name == "Problem":
            return _cls

        # ensure required fields
        missing = []
        for key in ("title", "kind"):
            if key not in attrs:
                missing.append(key)

        if missing:
            fmt = "Can't build a Problem: {} is missing the field(s): {}"
            raise TypeError(fmt.format(class_name, ", ".join(missing)))

        # constructor
        def __init__(self, detail: str | None = None, context: dict | None = None):
            self.detail = detail or "No detail provided"
            self.context = context

        # make it printable
        def __str__(self):
            fmt = "<{}(title='{}', detail='{}')>"
            return fmt.format(self.__class__.__name__, self.title, self.detail)

        # serializer
        def to_dict(self) -> dict:
            data = {
                "title": self.title,  # a generic one liner about the issue
                "detail": self.detail,  # a more contextual one liner about the issue
                "type": self.kind,  # a stable identifier for the issue
            }

            # if provided, additional data for debugging, etc...
            if self.context:
                data["context"] = self.context

            return data

        # bolt methods on and return class
        _cls.__init__ = __init__
        _cls.__str__ = __str__
        _cls.to_dict = to_dict
        return _cls


class Problem(Exception, metaclass=ProblemMeta):
    """The Problem base class, extend this to build new Problems.

    class WidgetMissing(Problem):
        title="The Widget was not found"
        kind="widget-missing"

    raise WidgetMissing("Could not find a widget called foobar")
    """


class EmptyValueError(Problem, ValueError):
    """Raised by `option.get` when the Option is Nothing.

    Guard with `option.is_some` first, or prefer `option.with_default`,
    `option.map` or `option.bind` when a value may be absent.
    """

    title = "Expected a present value but found none."
    kind = "empty-value"
