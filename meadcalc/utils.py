def format_number(x, digits=2):
    try:
        return f"{float(x):.{digits}f}"
    except (TypeError, ValueError):
        return str(x)


def format_gravity(sg):
    return format_number(sg, 3)


def format_amount(amount, unit):
    return f"{format_number(amount, 2)} {unit}"
