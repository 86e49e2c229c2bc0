"""Graphics state enumerations and the vertex attributes record."""