"""Identifiers of the textures and sprites used by the game."""

TEX_MARIO = 0
TEX_ENEMY = 10
TEX_MISC = 20

# Mario
SPRITE_MARIO = 10000
SPRITE_MARIO_BIG = SPRITE_MARIO + 1000
SPRITE_MARIO_BIG_IDLE = SPRITE_MARIO_BIG + 100
SPRITE_MARIO_BIG_IDLE_LEFT = SPRITE_MARIO_BIG_IDLE + 10
SPRITE_MARIO_BIG_IDLE_RIGHT = SPRITE_MARIO_BIG_IDLE + 20

SPRITE_MARIO_BIG_WALKING = SPRITE_MARIO_BIG + 200
SPRITE_MARIO_BIG_WALKING_LEFT = SPRITE_MARIO_BIG_WALKING + 10
SPRITE_MARIO_BIG_WALKING_RIGHT = SPRITE_MARIO_BIG_WALKING + 20
SPRITE_MARIO_BIG_RUNNING = SPRITE_MARIO_BIG + 300
SPRITE_MARIO_BIG_RUNNING_LEFT = SPRITE_MARIO_BIG_RUNNING + 10
SPRITE_MARIO_BIG_RUNNING_RIGHT = SPRITE_MARIO_BIG_RUNNING + 20
SPRITE_MARIO_BIG_JUMP = SPRITE_MARIO_BIG + 400
SPRITE_MARIO_BIG_JUMP_WALK = SPRITE_MARIO_BIG_JUMP + 10
SPRITE_MARIO_BIG_JUMP_WALK_LEFT = SPRITE_MARIO_BIG_JUMP_WALK + 2
SPRITE_MARIO_BIG_JUMP_WALK_RIGHT = SPRITE_MARIO_BIG_JUMP_WALK + 6
SPRITE_MARIO_BIG_JUMP_RUN = SPRITE_MARIO_BIG_JUMP + 20
SPRITE_MARIO_BIG_JUMP_RUN_LEFT = SPRITE_MARIO_BIG_JUMP_RUN + 2
SPRITE_MARIO_BIG_JUMP_RUN_RIGHT = SPRITE_MARIO_BIG_JUMP_RUN + 6
SPRITE_MARIO_BIG_SIT = SPRITE_MARIO_BIG + 500
SPRITE_MARIO_BIG_SIT_LEFT = SPRITE_MARIO_BIG_SIT + 10
SPRITE_MARIO_BIG_SIT_RIGHT = SPRITE_MARIO_BIG_SIT + 20
SPRITE_MARIO_BIG_BRACE = SPRITE_MARIO_BIG + 600
SPRITE_MARIO_BIG_BRACE_LEFT = SPRITE_MARIO_BIG_BRACE + 10
SPRITE_MARIO_BIG_BRACE_RIGHT = SPRITE_MARIO_BIG_BRACE + 20

SPRITE_MARIO_DIE = SPRITE_MARIO + 3000

SPRITE_MARIO_SMALL = SPRITE_MARIO + 2000
SPRITE_MARIO_SMALL_IDLE = SPRITE_MARIO_SMALL + 100
SPRITE_MARIO_SMALL_IDLE_LEFT = SPRITE_MARIO_SMALL_IDLE + 10
SPRITE_MARIO_SMALL_IDLE_RIGHT = SPRITE_MARIO_SMALL_IDLE + 20

SPRITE_MARIO_SMALL_WALKING = SPRITE_MARIO_SMALL + 200
SPRITE_MARIO_SMALL_WALKING_LEFT = SPRITE_MARIO_SMALL_WALKING + 10
SPRITE_MARIO_SMALL_WALKING_RIGHT = SPRITE_MARIO_SMALL_WALKING + 20
SPRITE_MARIO_SMALL_RUNNING = SPRITE_MARIO_SMALL + 300
SPRITE_MARIO_SMALL_RUNNING_LEFT = SPRITE_MARIO_SMALL_RUNNING + 10
SPRITE_MARIO_SMALL_RUNNING_RIGHT = SPRITE_MARIO_SMALL_RUNNING + 20
SPRITE_MARIO_SMALL_JUMP = SPRITE_MARIO_SMALL + 400
SPRITE_MARIO_SMALL_JUMP_WALK = SPRITE_MARIO_SMALL_JUMP + 10
SPRITE_MARIO_SMALL_JUMP_WALK_LEFT = SPRITE_MARIO_SMALL_JUMP_WALK + 2
SPRITE_MARIO_SMALL_JUMP_WALK_RIGHT = SPRITE_MARIO_SMALL_JUMP_WALK + 6
SPRITE_MARIO_SMALL_JUMP_RUN = SPRITE_MARIO_SMALL_JUMP + 20
SPRITE_MARIO_SMALL_JUMP_RUN_LEFT = SPRITE_MARIO_SMALL_JUMP_RUN + 2
SPRITE_MARIO_SMALL_JUMP_RUN_RIGHT = SPRITE_MARIO_SMALL_JUMP_RUN + 6

SPRITE_MARIO_SMALL_SIT = SPRITE_MARIO_SMALL + 500
SPRITE_MARIO_SMALL_SIT_LEFT = SPRITE_MARIO_SMALL_SIT + 10
SPRITE_MARIO_SMALL_SIT_RIGHT = SPRITE_MARIO_SMALL_SIT + 20

SPRITE_MARIO_SMALL_BRACE = SPRITE_MARIO_SMALL + 500
SPRITE_MARIO_SMALL_BRACE_LEFT = SPRITE_MARIO_SMALL_BRACE + 10
SPRITE_MARIO_SMALL_BRACE_RIGHT = SPRITE_MARIO_SMALL_BRACE + 20

SPRITE_BRICK = 20000

SPRITE_GOOMBA = 30000
SPRITE_GOOMBA_WALK = SPRITE_GOOMBA + 1000
SPRITE_GOOMBA_DIE = SPRITE_GOOMBA + 2000

SPRITE_GOOMBA1 = 31000
SPRITE_GOOMBA1_WALK = SPRITE_GOOMBA1 + 1100
SPRITE_GOOMBA1_DIE = SPRITE_GOOMBA1 + 2100

SPRITE_COIN = 40000

SPRITE_CLOUD = 50000
SPRITE_CLOUD_BEGIN = SPRITE_CLOUD + 1000
SPRITE_CLOUD_MIDDLE = SPRITE_CLOUD + 2000
SPRITE_CLOUD_END = SPRITE_CLOUD + 3000