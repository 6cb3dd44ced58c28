import logging
from typing import List, Optional, Sequence, Tuple


logger = logging.getLogger(__name__)

DEFAULT_CRUST = 'Thin'
DEFAULT_SIZE = 'Medium'
DEFAULT_CHEESE = 'Mozzarella'
DEFAULT_SAUCE = 'Tomato'


def require_text(value: Optional[str], name: str) -> str:
    """Return ``value`` with outer whitespace removed.

    Raises ValueError naming the field when the value is missing or
    blank, and TypeError when it is not a string.
    """
    if value is None:
        raise ValueError("%s must not be blank" % name)
    if not isinstance(value, str):
        raise TypeError("%s must be a string" % name)
    stripped = value.strip()
    if not stripped:
        raise ValueError("%s must not be blank" % name)
    return stripped


class Pizza:
    """Immutable pizza assembled by PizzaBuilder.

    Instances are only created by PizzaBuilder.build().
    """

    __slots__ = ('_crust', '_size', '_cheese', '_sauce', '_toppings')

    def __init__(self, crust: str, size: str, cheese: str, sauce: str, toppings: Sequence[str]):
        object.__setattr__(self, '_crust', crust)
        object.__setattr__(self, '_size', size)
        object.__setattr__(self, '_cheese', cheese)
        object.__setattr__(self, '_sauce', sauce)
        object.__setattr__(self, '_toppings', tuple(toppings))

    def __setattr__(self, name, value):
        raise AttributeError("Pizza is immutable, cannot set %s" % name)

    def __delattr__(self, name):
        raise AttributeError("Pizza is immutable, cannot delete %s" % name)

    def __reduce__(self):
        # rebuild through __init__, slots cannot be restored with setattr
        return (Pizza, (self._crust, self._size, self._cheese, self._sauce, self._toppings))

    @property
    def crust(self) -> str:
        return self._crust

    @property
    def size(self) -> str:
        return self._size

    @property
    def cheese(self) -> str:
        return self._cheese

    @property
    def sauce(self) -> str:
        return self._sauce

    @property
    def toppings(self) -> Tuple[str, ...]:
        return self._toppings

    def __str__(self):
        return "Pizza{crust='%s', " \
               "size='%s', " \
               "cheese='%s', " \
               "sauce='%s', " \
               "toppings=[%s]}" \
               % (self._crust, self._size, self._cheese, self._sauce, ', '.join(self._toppings))

    __repr__ = __str__


class PizzaBuilder:
    """Collects pizza attributes step by step and builds immutable pizzas.

    Starts from Thin crust, Medium size, Mozzarella cheese and Tomato sauce
    with no toppings. Every setter trims its value and rejects blank input
    before touching any state, so a failed call leaves the builder as it was.
    The builder is not consumed by build() and can be reused.

        builder = PizzaBuilder()
        builder.set_crust('Thick')
        builder.add_topping('Pepperoni')
        pizza = builder.build()
    """

    def __init__(self):
        self._crust = DEFAULT_CRUST
        self._size = DEFAULT_SIZE
        self._cheese = DEFAULT_CHEESE
        self._sauce = DEFAULT_SAUCE
        self._toppings: List[str] = []

    def set_crust(self, value: Optional[str]):
        self._crust = require_text(value, 'crust')

    def set_size(self, value: Optional[str]):
        self._size = require_text(value, 'size')

    def set_cheese(self, value: Optional[str]):
        self._cheese = require_text(value, 'cheese')

    def set_sauce(self, value: Optional[str]):
        self._sauce = require_text(value, 'sauce')

    def add_topping(self, value: Optional[str]):
        # duplicates are kept, in call order
        self._toppings.append(require_text(value, 'topping'))

    def build(self) -> Pizza:
        pizza = Pizza(self._crust, self._size, self._cheese, self._sauce, self._toppings)
        logger.debug("Built %s", pizza)
        return pizza


def main() -> int:
    print("Pizza Builder ready")
    print("Use PizzaBuilder to create your custom pizza!")
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
