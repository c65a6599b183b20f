#!/usr/bin/env python3

# Copyright (C) 2026 The ctlib developers
#
# This file is part of ctlib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ctlib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"__init__ module for the ctlib package."

import logging

name = "ctlib"
__version__ = "2026.10.0"
__author__ = "The ctlib developers"
__author_email__ = "devs@ctlib.org"
__copyright__ = "Copyright (C) 2026 The ctlib developers"
__license__ = "MIT License"

# the host application configures logging handlers, not the library
logging.getLogger(__name__).addHandler(logging.NullHandler())
