"""Host adapters embedding the editing core."""
