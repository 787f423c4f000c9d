# Discount Service
