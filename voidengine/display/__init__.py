"""Window, input and monitor descriptions: enumerations, hints and event records."""