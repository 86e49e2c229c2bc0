"""Texture, shader and image enumerations, and shader source and glyph records."""