# Copyright (c) 2026 Harsh Dwivedi
# Licensed under the Harsh Non-Commercial Attribution License (HNCAL) v1.0
# Commercial use requires written permission. See LICENSE for details.

"""
TierList — Core Modules
  safety     URL validation, host resolution, bounded image fetch
  layout     tier resolution and canvas geometry
  text       adaptive label fitting
  rendering  drawing surface and tier list renderer
"""
