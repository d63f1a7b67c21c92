"""Hides by running right and then down; seeks by sweeping rows."""

_sweep = {"heading": "left", "last_remaining": None}


def hider(sense_walls, sense_obstacles, remaining_ticks, move):
    blocked = sense_obstacles()
    if not blocked["right"]:
        move("right")
    elif not blocked["down"]:
        move("down")


def seeker(sense_walls, sense_obstacles, remaining_ticks, move):
    remaining = remaining_ticks()
    # remaining only counts down within a match
    last = _sweep["last_remaining"]
    if last is None or remaining >= last:
        _sweep["heading"] = "left"
    _sweep["last_remaining"] = remaining

    blocked = sense_obstacles()
    heading = _sweep["heading"]
    if not blocked[heading]:
        move(heading)
        return
    _sweep["heading"] = "right" if heading == "left" else "left"
    if not blocked["up"]:
        move("up")
    elif not blocked["down"]:
        move("down")
