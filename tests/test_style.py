import pytest

from phasordiagram import PhasorStyle


def test_defaults() -> None:
    style = PhasorStyle()
    assert style.par == 0.0
    assert style.rlabel == 0.5
    assert style.tlabel == 0.1
    assert style.label == ""
    assert (style.ha, style.va) == ("center", "center")
    assert style.relrot is False
    assert style.relangle == 0.0
    assert (style.color, style.linestyle, style.linewidth) == ("black", "-", 1.0)
    assert (style.width, style.headlength, style.headwidth) == (0.2, 10.0, 5.0)


@pytest.mark.parametrize("absangle", [-135.0, 0.0, 45.0, 170.0])
def test_label_rotation_without_relative_rotation(absangle) -> None:
    style = PhasorStyle(relangle=12.5)
    assert style.label_rotation(absangle) == 12.5


def test_label_rotation_with_relative_rotation() -> None:
    assert PhasorStyle(relrot=True).label_rotation(90.0) == 90.0
    assert PhasorStyle(relrot=True, relangle=-90.0).label_rotation(30.0) == -60.0


def test_replace() -> None:
    style = PhasorStyle(color="red")
    new = style.replace(label="V", linestyle="--")
    assert (new.color, new.label, new.linestyle) == ("red", "V", "--")
    assert style.label == ""
    assert style.replace() is style


def test_replace_unknown_option() -> None:
    with pytest.raises(TypeError):
        PhasorStyle().replace(colour="red")
