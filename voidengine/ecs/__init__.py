"""Entities, component pools and the world that ties them together."""