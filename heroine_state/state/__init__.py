"""
Heroine behavior states.

Two states drive the heroine: WALKING and JUMPING. Walking hands over to
jumping when the epoch second is divisible by 3, jumping hands back when it
is divisible by 7.
"""
