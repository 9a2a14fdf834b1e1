class MeadCalcError(ValueError):
    """Base class for every error a calculation or input check can raise."""


class InvalidSweetness(MeadCalcError):
    def __init__(self, label):
        self.label = label
        super().__init__(
            f"Invalid sweetness level {label!r}. "
            "Please use Dry, Semi-Sweet, Sweet, or Dessert."
        )


class InvalidInput(MeadCalcError):
    pass


class ImplausibleGravityTarget(MeadCalcError):
    def __init__(self, og: float, ceiling: float):
        self.og = og
        self.ceiling = ceiling
        super().__init__(
            f"Calculated Original Gravity (OG={og:.3f}) is extremely high "
            f"(limit {ceiling:.3f})."
        )
