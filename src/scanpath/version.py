from __future__ import annotations

__version__ = '0.3.0'
__title__ = 'scanpath'
__long_title__ = f'{__title__} v{__version__}'
__author__ = 'Scanpath developers'
__author_email__ = 'scanpath@example.org'
__description__ = 'Angles, unit-tagged vectors and scan path generation for instrument scans'
__license__ = 'GPLv3'
__url__ = 'https://github.com/scanpath/scanpath'
__issues__ = __url__ + '/issues'
