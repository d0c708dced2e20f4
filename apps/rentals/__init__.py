"""Rentals app package.

This app holds the booking core: the vehicle, client and rental domain
entities, the availability check that prevents double booking, the guard
that keeps vehicles and clients with ongoing rentals from being
deactivated, and the pricing of rentals. Writes go through
``RentalService`` inside a database transaction with the vehicle row
locked.
"""
