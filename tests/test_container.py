from tombgrid.events import MouseButtonEvent, MouseMoveEvent
from tombgrid.gui.constraints import Constraints, absolute
from tombgrid.gui.container import Container
from tombgrid.gui.widget import BLACK, WHITE, RecordingCanvas, Rectangle, Widget


class _FakeGui:
    def box(self):
        return Rectangle(0, 0, 800, 600)


class _Probe(Widget):
    def __init__(self, widget_id, gui):
        super().__init__(widget_id, gui, WHITE)
        self.updates = 0
        self.buttons = []
        self.moves = []

    def update(self):
        self.updates += 1

    def handle_mouse_button_event(self, event):
        self.buttons.append(event)

    def handle_mouse_move_event(self, event):
        self.moves.append(event)


def _container():
    gui = _FakeGui()
    container = Container("root", gui, BLACK)
    first, second = _Probe("a", gui), _Probe("b", gui)
    container.add_child(first)
    container.add_child(second)
    return container, first, second


def test_add_child_sets_parent():
    container, first, second = _container()
    assert first.parent is container
    assert container.children == [first, second]


def test_get_child():
    container, _, second = _container()
    assert container.get_child("b") is second
    assert container.get_child("missing") is None


def test_show_and_hide_propagate():
    container, first, second = _container()
    container.show()
    assert all(w.visible for w in (container, first, second))
    container.hide()
    assert not any(w.visible for w in (container, first, second))


def test_events_forwarded_only_when_visible():
    container, first, second = _container()
    click = MouseButtonEvent(1, 1, 0, 1, 0)
    container.handle_mouse_button_event(click)
    assert first.buttons == []
    container.show()
    container.handle_mouse_button_event(click)
    move = MouseMoveEvent(1, 1, 0, 0)
    container.handle_mouse_move_event(move)
    assert first.buttons == [click] and second.buttons == [click]
    assert second.moves == [move]


def test_update_reaches_children():
    container, first, second = _container()
    container.update()
    container.update()
    assert (first.updates, second.updates) == (2, 2)


def test_render_draws_self_then_children():
    container, first, second = _container()
    container.constraints = Constraints(absolute(0), absolute(0), absolute(50), absolute(50))
    container.show()
    canvas = RecordingCanvas()
    container.render(canvas)
    colors = [call[2] for call in canvas.calls]
    assert colors == [BLACK, WHITE, WHITE]