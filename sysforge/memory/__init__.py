"""Arena and pool allocators over byte buffers, with allocation statistics."""