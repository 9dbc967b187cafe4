from tombgrid.gui.constraints import Constraints, absolute
from tombgrid.gui.label import Label, TextAlign
from tombgrid.gui.widget import BLACK, TRANSPARENT, RecordingCanvas, Rectangle


class _FakeGui:
    def box(self):
        return Rectangle(0, 0, 800, 600)


def _label(align):
    label = Label("l", _FakeGui(), TRANSPARENT, "Hello", BLACK)
    label.constraints = Constraints(absolute(10), absolute(20), absolute(400), absolute(60))
    label.text_align = align
    label.show()
    return label


def _text_call(canvas):
    return next(call for call in canvas.calls if call[0] == "text")


def test_hidden_label_draws_nothing():
    label = _label(TextAlign.CENTER)
    label.hide()
    canvas = RecordingCanvas()
    label.render(canvas)
    assert canvas.calls == []


def test_begin_alignment_draws_at_box_origin():
    canvas = RecordingCanvas()
    _label(TextAlign.BEGIN).render(canvas)
    assert _text_call(canvas) == ("text", "Hello", 10, 20, 28, BLACK)


def test_center_alignment_stays_inside_box():
    canvas = RecordingCanvas()
    _label(TextAlign.CENTER).render(canvas)
    _, text, x, y, size, color = _text_call(canvas)
    width = canvas.measure_text(text, size)
    assert 10 < x and x + width < 410
    assert 20 < y and y + size < 80
    assert color == BLACK


def test_background_drawn_before_text():
    canvas = RecordingCanvas()
    _label(TextAlign.CENTER).render(canvas)
    assert [call[0] for call in canvas.calls] == ["rectangle", "text"]