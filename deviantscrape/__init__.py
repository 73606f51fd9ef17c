"""
deviantscrape: typed records from deviantART pages.

Page profiles in ``deviantscrape.pages`` turn a parsed document into
records; ``deviantscrape.driver.sync_driver.SyncDriver`` fetches a page and
runs its profile.
"""
