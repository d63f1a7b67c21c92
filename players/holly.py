"""Runs for the bottom-right corner as Hider, the top-left as Seeker."""


def hider(sense_walls, sense_obstacles, remaining_ticks, move):
    walls = sense_walls()
    if not walls["down"]:
        move("down")
    elif not walls["right"]:
        move("right")


def seeker(sense_walls, sense_obstacles, remaining_ticks, move):
    walls = sense_walls()
    if not walls["left"]:
        move("left")
    elif not walls["up"]:
        move("up")
