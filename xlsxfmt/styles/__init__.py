"""Cell style enums, style information, style options and named styles."""