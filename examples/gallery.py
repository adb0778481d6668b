"""Renders a preview of every curve into out/examples/gallery.png, and one
large preview of each phase of the bounce family."""

import os
import pyease.preview as preview
from pyease.curves import Curve, Family, Phase

def _main():
    os.makedirs('out/examples', exist_ok=True)

    preview.save_gallery(
        'out/examples/gallery.png',
        columns=4,
        settings=preview.PreviewSettings(frame_size=(160, 160), margin=0.25)
    )

    large = preview.PreviewSettings(frame_size=(480, 480), line_color='red',
                                    line_width=3)
    preview.save_gallery(
        'out/examples/bounce.png',
        [Curve.of(Family.BOUNCE, phase) for phase in Phase],
        settings=large
    )

if __name__ == '__main__':
    _main()
