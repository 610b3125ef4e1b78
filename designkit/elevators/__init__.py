"""Elevator floors, requests, cars, scheduling and building simulation."""