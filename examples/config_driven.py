"""Moves a value from 0 to 100 with the easing named in a json config, the
way a tweening system would pick up a curve chosen by a user. Falls back to
linear if the name isn't known."""

import json
import pyease.easing as easing
import pyease.resolve as resolve

CONFIG = '{"ease": "in-out-back", "steps": 10}'

def _main():
    config = json.loads(CONFIG)

    ease = resolve.resolve_by_name(config['ease'])
    if ease is None:
        print(f'unknown ease {config["ease"]}, using linear')
        ease = easing.linear

    steps = config['steps']
    for i in range(steps + 1):
        perc = i / steps
        print(f'{perc:4.1f} -> {100 * ease(perc):7.2f}')

if __name__ == '__main__':
    _main()
