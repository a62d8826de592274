"""Common input constraints shared by the routers and request schemas."""

# Largest value an INTEGER primary key holds on PostgreSQL
MAX_ID = 2_147_483_647
