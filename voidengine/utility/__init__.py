"""Bit masks, event dispatch, state tracking, logging and timing."""