from mandelview.colormaps import INSIDE_COLOUR, gradient_value, paint


def test_inside_is_black():
    assert paint(None, 200) == (0, 0, 0)
    assert INSIDE_COLOUR == (0, 0, 0)


def test_first_step_is_black():
    assert paint(0, 200) == (0, 0, 0)


def test_last_step():
    assert gradient_value(199, 200) == 253
    assert paint(199, 200) == (126, 253, 253)


def test_gradient_is_clamped_to_a_byte():
    assert gradient_value(400, 200) == 255


def test_green_white_ratio():
    r, g, b = paint(100, 200)
    assert (r, g, b) == (63, 127, 127)
