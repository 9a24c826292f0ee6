"""A single-threaded cooperative executor and its primitive awaitables."""