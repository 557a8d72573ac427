#!/usr/bin/env python3
#
# Copyright 2022 Max Planck Insitute Magdeburg
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#
#
#
"""Static strings and defaults used in the rnmat package

    Magnitudes

        MAGNITUDE_BITS = 32

    Recoverable matrix errors

        ROW_DISMATCH = 'row_dismatch'

        COL_DISMATCH = 'col_dismatch'

        INVALID_INDEX = 'invalid_index'

    Display

        FRACTION_SEPARATOR = '/'

        ENTRY_SEPARATOR = ', '
"""

# magnitudes
MAGNITUDE_BITS = 32

# recoverable matrix errors
ROW_DISMATCH = 'row_dismatch'
COL_DISMATCH = 'col_dismatch'
INVALID_INDEX = 'invalid_index'

# display
FRACTION_SEPARATOR = '/'
ENTRY_SEPARATOR = ', '
