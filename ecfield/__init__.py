#!/usr/bin/env python3

# Copyright (C) 2022-2026 The ecfield developers
#
# This file is part of ecfield. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecfield including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"__init__ module for the ecfield package."

import logging

name = "ecfield"
__version__ = "2026.10.1"
__author__ = "The ecfield developers"
__author_email__ = "devs@ecfield.org"
__copyright__ = "Copyright (C) 2022-2026 The ecfield developers"
__license__ = "MIT License"

logging.getLogger(__name__).addHandler(logging.NullHandler())
