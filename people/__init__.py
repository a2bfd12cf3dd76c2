"""
People Domain

Person records enriched at creation time with age, gender and nationality
guessed from the first name by external lookup services:
- Person persistence with normalized gender/nationality lookup tables
- Enrichment through the agify/genderize/nationalize style APIs
- CRUD and filtered listing over HTTP
"""
