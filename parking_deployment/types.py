import click


class WeiAmount(click.ParamType):
    """A non-negative integer amount in the smallest denomination (wei)."""

    name = "wei"

    def convert(self, value, param, ctx):
        if isinstance(value, int) and not isinstance(value, bool):
            ivalue = value
        else:
            try:
                ivalue = int(str(value).strip())
            except ValueError:
                self.fail(f"{value} is not a valid integer wei amount", param, ctx)
        if ivalue < 0:
            self.fail(f"{value} is a negative wei amount", param, ctx)
        return ivalue
