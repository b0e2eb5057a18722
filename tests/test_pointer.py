from screenmap.automation.pointer import MOVE_HISTORY_SIZE, PointerMover
from screenmap.vision.models import ScreenPoint


def test_points_are_passed_through_unchanged(driver):
    mover = PointerMover(driver=driver)
    mover.move_to(ScreenPoint(-20.0, 5000.5))
    assert driver.moves == [(-20.0, 5000.5)]
    assert list(mover.move_history) == [{"x": -20.0, "y": 5000.5}]


def test_move_history_keeps_only_recent_moves(driver):
    mover = PointerMover(driver=driver, duration=0.0)
    for i in range(MOVE_HISTORY_SIZE + 25):
        mover.move_to(ScreenPoint(float(i), 0.0))

    assert len(driver.moves) == MOVE_HISTORY_SIZE + 25
    assert len(mover.move_history) == MOVE_HISTORY_SIZE
    assert mover.move_history[0] == {"x": 25.0, "y": 0.0}
    assert mover.move_history[-1] == {"x": float(MOVE_HISTORY_SIZE + 24), "y": 0.0}
