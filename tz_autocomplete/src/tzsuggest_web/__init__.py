"""Flask UI/API and command line front ends for the timezone autocomplete engine."""
