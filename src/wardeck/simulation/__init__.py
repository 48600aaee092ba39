"""War game model, deck handling and turn resolution."""
