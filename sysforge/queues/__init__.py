"""Bounded single-producer and multi-producer queues."""